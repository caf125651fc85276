"""EventDesk - events, reviews and the request pipeline that serves them."""

__version__ = "1.0.0"
