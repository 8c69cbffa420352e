"""netinspect: browse Petri nets and the views derived from them."""

__version__ = "0.3.0"
