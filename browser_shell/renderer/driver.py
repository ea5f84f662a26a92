from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.chrome.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager


def new_webdriver(headless: bool = True, window_size: tuple[int, int] = (800, 600)) -> WebDriver:
    width, height = window_size

    options = Options()
    options.page_load_strategy = "eager"
    options.add_argument("--disable-extensions")
    options.add_argument(f"--window-size={width},{height}")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])

    if headless:
        options.add_argument("--headless")

    return webdriver.Chrome(service=Service(ChromeDriverManager().install()), options=options)
