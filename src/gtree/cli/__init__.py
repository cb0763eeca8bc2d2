"""Command-line interface and ``tree``-style argument translation for gtree."""
