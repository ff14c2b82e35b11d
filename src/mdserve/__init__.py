"""mdserve - Markdown documents served as HTML pages."""
