class ToolArgumentError(ValueError):
    """Raised before any network activity when a tool's required arguments are missing or malformed."""


class UnknownToolError(KeyError):
    def __init__(self, name: str, valid_names=()):
        self.name = name
        self.valid_names = sorted(valid_names)
        super().__init__(name)

    def __str__(self):
        return f"Tool '{self.name}' is not available. Valid tools are: {', '.join(self.valid_names)}"
