"""Form generation exceptions."""


class FormGenError(Exception):
    """Base class for html-formgen errors."""


class InvalidDescriptorError(FormGenError, TypeError):
    """Raised when no usable parameter descriptor can be derived from the input."""
