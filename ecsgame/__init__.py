"""Entity-component-system game framework, scene engine and a top-down arcade shooter."""

__version__ = "0.1.0"