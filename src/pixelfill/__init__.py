"""Paint-by-number board engine: colour regions, borders and fill-on-click."""
