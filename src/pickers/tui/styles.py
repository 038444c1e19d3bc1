"""Textual CSS for the TUI."""

TUI_CSS = """
Screen {
    background: $surface;
}

BannerCarousel {
    height: 5;
    border: round $primary;
    content-align: center middle;
    text-align: center;
    margin: 0 1;
}

.search-row {
    height: 3;
    margin: 0 1;
}

#search-input {
    width: 1fr;
}

#btn-cancel {
    margin: 0 1;
}

#item-list {
    height: 1fr;
    border: solid $secondary;
    margin: 0 1;
}

#status {
    height: 1;
    margin: 0 1;
    text-style: dim;
}

DetailScreen {
    align: center middle;
}

#detail-dialog {
    width: 60;
    height: auto;
    border: thick $primary;
    background: $panel;
    padding: 1 2;
}

#detail-label {
    text-style: bold;
    text-align: center;
    margin-bottom: 1;
}

#detail-icon {
    text-align: center;
    text-style: dim;
    margin-bottom: 1;
}

.detail-buttons {
    height: 3;
    align: center middle;
}
"""
