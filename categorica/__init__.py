"""Categories, functors, monads, finite sets and executable checks of their laws."""

__version__ = "0.1.0"