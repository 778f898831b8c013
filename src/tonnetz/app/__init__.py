"""
The APP layer holds interaction state and turns pointer/selection events
into model calls. It talks to views through Qt signals only.
"""
