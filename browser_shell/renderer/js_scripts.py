"""JavaScript injected into loaded pages to observe hyperlinks."""

INSTALL_LINK_LISTENER_SCRIPT = """
if (!window.__browserShellLinks) {
    window.__browserShellLinks = { events: [] };

    const record = function(event) {
        const anchor = event.currentTarget;
        const href = anchor.href || anchor.getAttribute('href');
        if (!href) {
            return;
        }
        if (event.type === 'click') {
            // The shell decides where to navigate
            event.preventDefault();
        }
        window.__browserShellLinks.events.push({ type: event.type, href: href });
    };

    document.querySelectorAll('a[href]').forEach(function(anchor) {
        anchor.addEventListener('click', record, false);
        anchor.addEventListener('mouseover', record, false);
        anchor.addEventListener('mouseout', record, false);
    });
}
return document.querySelectorAll('a[href]').length;
"""

DRAIN_LINK_EVENTS_SCRIPT = """
const state = window.__browserShellLinks;
if (!state) {
    return [];
}
const events = state.events;
state.events = [];
return events;
"""
