"""Static reference tables: countries, sectors, indicators and market quotes."""
