"""Django project package for pixelchart."""
