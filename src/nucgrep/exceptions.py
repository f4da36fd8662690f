"""Custom exceptions for nucgrep."""


class NucgrepError(Exception):
    """Base exception for all nucgrep errors."""
    pass


class ConfigurationError(NucgrepError):
    """Exception raised for invalid scan configuration."""
    
    def __init__(self, message: str, config_file: str = None, parameter: str = None):
        self.config_file = config_file
        self.parameter = parameter
        
        if config_file is not None:
            message = f"Configuration error in {config_file}: {message}"
        if parameter is not None:
            message = f"{message} (parameter: {parameter})"
            
        super().__init__(message)


class UnsupportedSymbolError(ConfigurationError):
    """Exception raised when a pattern symbol has no defined complement."""
    
    def __init__(self, symbol: str, position: int = None, message: str = None):
        self.symbol = symbol
        self.position = position
        
        if message is None:
            message = f"Unsupported symbol {symbol!r}"
        if position is not None:
            message = f"{message} at position {position}"
            
        super().__init__(message, parameter="pattern")


class MalformedInputError(NucgrepError):
    """Exception raised when FASTA input violates the record structure."""
    
    def __init__(self, message: str, line_number: int = None, line_content: str = None):
        self.line_number = line_number
        self.line_content = line_content
        
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        if line_content is not None:
            shown = line_content if len(line_content) <= 50 else f"{line_content[:50]}..."
            message = f"{message} (content: {shown})"
            
        super().__init__(message)
