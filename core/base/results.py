from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ServiceExecutionResult:
    """
    Outcome of a service call that validates before persisting.

    target_object is the (possibly unsaved) object the call worked on;
    validation_errors maps field paths to lists of messages and is empty
    on success.
    """
    target_object: Any
    validation_errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return not self.validation_errors

    @classmethod
    def failed(cls, target_object, validation_errors: Dict[str, List[str]]) -> 'ServiceExecutionResult':
        return cls(target_object=target_object, validation_errors=validation_errors)

    def first_error(self) -> Optional[str]:
        for field_name, messages in self.validation_errors.items():
            if messages:
                return f"{field_name}: {messages[0]}"
        return None


def validation_error_dict(exc) -> Dict[str, List[str]]:
    """Field -> messages mapping for a django ValidationError."""
    if hasattr(exc, 'error_dict'):
        return exc.message_dict
    return {'non_field_errors': exc.messages}
