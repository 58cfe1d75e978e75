"""Custom exceptions for the STR realigner."""


class PipelineError(Exception):
    """Base exception for all realigner errors."""
    pass


class ParseError(PipelineError):
    """Exception raised during input parsing."""

    def __init__(self, message: str, line_number: int = None, line_content: str = None):
        self.line_number = line_number
        self.line_content = line_content

        if line_number is not None:
            message = f"Line {line_number}: {message}"
        if line_content is not None:
            message = f"{message} (content: {line_content[:50]}...)"

        super().__init__(message)


class AlignmentError(PipelineError):
    """Exception raised during local alignment."""
    pass


class MatrixBoundsError(AlignmentError):
    """Exception raised when a score matrix cell is addressed outside its bounds."""

    def __init__(self, message: str, row: int = None, col: int = None):
        self.row = row
        self.col = col

        if row is not None and col is not None:
            message = f"{message} (cell: {row}, {col})"

        super().__init__(message)


class RealignmentError(PipelineError):
    """Exception raised for invalid expansion-aware realignment input."""

    def __init__(self, message: str, locus_name: str = None):
        self.locus_name = locus_name

        if locus_name is not None:
            message = f"Realignment failed for locus {locus_name}: {message}"

        super().__init__(message)


class ClassificationError(PipelineError):
    """Exception raised when a realigned read matches no structural class."""

    def __init__(self, message: str, start_pos: int = None, end_pos: int = None):
        self.start_pos = start_pos
        self.end_pos = end_pos

        if start_pos is not None and end_pos is not None:
            message = f"{message} (read span: {start_pos}-{end_pos})"

        super().__init__(message)


class ConfigurationError(PipelineError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, config_file: str = None, parameter: str = None):
        self.config_file = config_file
        self.parameter = parameter

        if config_file is not None:
            message = f"Configuration error in {config_file}: {message}"
        if parameter is not None:
            message = f"{message} (parameter: {parameter})"

        super().__init__(message)
