"""Configuration management for the squash tool."""

from dataclasses import dataclass


@dataclass
class SquashConfig:
    """Configuration for squash operations."""

    # Message and menu formatting
    max_message_length: int = 80
    hour_column_width: int = 8

    # Branch settings
    backup_branch_prefix: str = "backup/"

    # ai settings
    model: str = "claude-3-7-sonnet-20250219"
    max_diff_chars: int = 8000

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if self.max_message_length <= 3:
            raise ValueError(
                f"max_message_length must be greater than 3, got {self.max_message_length}")
        if self.hour_column_width <= 0:
            raise ValueError(
                f"hour_column_width must be positive, got {self.hour_column_width}")
        if self.max_diff_chars < 0:
            raise ValueError(
                f"max_diff_chars cannot be negative, got {self.max_diff_chars}")

        if not isinstance(self.backup_branch_prefix, str):
            raise ValueError(
                f"backup_branch_prefix must be a string, got {type(self.backup_branch_prefix)}")

        # Validate prefix doesn't contain characters git refuses in ref names
        invalid_chars = [' ', '\n', '\t', '..',
                         '~', '^', ':', '?', '*', '[', '\\']
        for char in invalid_chars:
            if char in self.backup_branch_prefix:
                raise ValueError(
                    f"backup_branch_prefix contains invalid character '{char}': {self.backup_branch_prefix}")

        if not isinstance(self.model, str):
            raise ValueError(f"model must be a string, got {type(self.model)}")

    @property
    def backup_branch_name(self) -> str:
        return f"{self.backup_branch_prefix}pre-squash"

    @classmethod
    def from_cli_args(cls, args) -> 'SquashConfig':
        """Create config from command line arguments."""
        try:
            return cls(
                max_message_length=getattr(
                    args, 'message_limit', cls.max_message_length),
                model=getattr(args, 'model', cls.model)
            )
        except ValueError as e:
            raise ValueError(
                f"Invalid configuration from command line arguments: {e}") from e

    def with_overrides(self, **kwargs) -> 'SquashConfig':
        """Create a new config with specific overrides."""
        fields = {field.name: getattr(self, field.name)
                  for field in self.__dataclass_fields__.values()}
        fields.update(kwargs)
        return SquashConfig(**fields)
