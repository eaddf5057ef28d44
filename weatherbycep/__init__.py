"""Current temperature lookup by Brazilian zipcode (CEP), served over HTTP."""

__version__ = "0.1.0"