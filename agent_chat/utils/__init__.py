from .ids import generate_id
from .responses import error_response

__all__ = ["error_response", "generate_id"]
