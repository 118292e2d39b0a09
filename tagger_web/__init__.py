"""Flask web service exposing product tag suggestions."""
