"""Request-to-content resolution: paths, titles, rendering and sitemap."""
