"""cargo-open: open an installed crate's source in your editor."""

__version__ = "0.1.0"
