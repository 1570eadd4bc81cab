from elfarena.helpers.debug import log_call

__all__ = ["log_call"]
