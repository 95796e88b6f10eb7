"""Client-side handlers that call the account administration API."""

from .delete_user_form import DELETE_USER_PATH, DeleteUserForm, FormState

__all__ = ["DELETE_USER_PATH", "DeleteUserForm", "FormState"]
