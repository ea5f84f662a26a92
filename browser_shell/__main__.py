import argparse
import logging
import os
import shlex
import sys
from typing import Optional

from dotenv import load_dotenv

from browser_shell import BrowserModel
from browser_shell.config import BrowserConfig, load_labels
from browser_shell.errors import RendererError
from browser_shell.renderer.base import PageRenderer
from browser_shell.renderer.chrome import ChromeRenderer
from browser_shell.view import BrowserView

logger = logging.getLogger(__name__)

HELP = """Commands:
  go <url>       open a page
  back           previous page
  next           next page
  home           open the home page
  sethome        make the current page the home page
  fav <name>     save the current page as a favorite
  show <name>    open a favorite
  favs           list favorites
  status         show the status line
  shot <file>    save a screenshot of the page
  help           show this text
  quit           close the browser"""

# Commands that need an argument
USAGE = {
    "go": "go <url>",
    "show": "show <name>",
    "shot": "shot <file>",
}


def render_prompt(view: BrowserView) -> str:
    """Build the prompt line: enabled buttons followed by the address."""
    labels = view.labels
    buttons = [
        labels["BackCommand"] if view.back_enabled else "-",
        labels["NextCommand"] if view.next_enabled else "-",
        labels["HomeCommand"] if view.home_enabled else "-",
    ]
    return f"[{' | '.join(buttons)}] {view.url_text or '(blank)'} > "


def run_command(view: BrowserView, line: str) -> bool:
    """
    Execute one command line against the view.

    Returns:
        bool: False when the user asked to quit
    """
    try:
        words = shlex.split(line)
    except ValueError as e:
        print(f"Could not parse command: {str(e)}")
        return True
    if not words:
        return True

    command, args = words[0].lower(), words[1:]
    argument = " ".join(args) if args else None

    if command in ("quit", "exit"):
        return False
    elif command == "help":
        print(HELP)
    elif command in USAGE and not argument:
        print(f"Usage: {USAGE[command]}")
    elif command == "go":
        view.show_page(argument)
    elif command == "back":
        view.back()
    elif command == "next":
        view.next()
    elif command == "home":
        view.home()
    elif command == "sethome":
        view.set_home()
    elif command == "fav":
        name = argument or prompt_text(f"{view.labels['FavoritePrompt']}: ")
        if name is not None:
            view.add_favorite(name)
    elif command == "show":
        view.show_favorite(argument)
    elif command == "favs":
        print(f"{view.labels['FavoriteFirstItem']}:")
        for name in view.favorite_names:
            print(f"  {name} -> {view.model.get_favorite(name)}")
    elif command == "status":
        print(view.status)
    elif command == "shot":
        save_screenshot(view.renderer, argument)
    else:
        print(f"Unknown command: {line.strip()} (try 'help')")
    return True


def prompt_text(prompt: str) -> Optional[str]:
    """Read a line from the user, None if they cancelled."""
    try:
        return input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def log_level(name: str) -> int:
    """Resolve a logging level name such as "info"."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level


def save_screenshot(renderer: PageRenderer, filename: str) -> None:
    if not isinstance(renderer, ChromeRenderer):
        print("Screenshots are not supported by this renderer")
        return
    try:
        path = renderer.save_screenshot(filename)
        print(f"Saved {path}")
    except (RendererError, OSError) as e:
        print(f"Screenshot failed: {str(e)}")


def print_error(title: str, message: str) -> None:
    print(f"{title}: {message}")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="browser_shell",
        description="Minimal web browser driven from the terminal"
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="Page to open on start"
    )
    parser.add_argument(
        "--language",
        help="Label language (default: BROWSER_LANGUAGE or english)"
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the Chrome window instead of running headless"
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    try:
        logging.basicConfig(
            level=log_level(os.environ.get("BROWSER_LOG_LEVEL", "WARNING")),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        config = BrowserConfig.from_env()
        if args.language:
            config.language = args.language.lower()
        if args.headed:
            config.headless = False
        labels = load_labels(config.language)
    except ValueError as e:
        print(f"Error: {str(e)}")
        return 1

    with ChromeRenderer.from_config(config) as renderer:
        view = BrowserView(BrowserModel(), renderer, labels, error_listener=print_error)
        if args.url:
            view.show_page(args.url)

        print(HELP)
        while True:
            view.process_link_events()
            try:
                line = input(render_prompt(view))
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if not run_command(view, line):
                break
    return 0


if __name__ == "__main__":
    sys.exit(main())
