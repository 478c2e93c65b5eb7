"""Control-character constants and package errors."""
