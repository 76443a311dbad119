"""
Stock hook callbacks.

Small named callbacks for the common "replace the value" filters. Using named
functions rather than lambdas keeps them addressable by name in the module
options (``hooks.<hook>.<callback>``).
"""

from typing import Any, List


def return_true(*args: Any) -> bool:
    return True


def return_false(*args: Any) -> bool:
    return False


def return_zero(*args: Any) -> int:
    return 0


def return_null(*args: Any) -> None:
    return None


def return_empty_list(*args: Any) -> List[Any]:
    return []


def return_empty_string(*args: Any) -> str:
    return ""
