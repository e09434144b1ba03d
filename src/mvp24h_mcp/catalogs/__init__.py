"""Static lookup tables, one module per tool."""
