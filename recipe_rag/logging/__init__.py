from .event_logger import log_generation_event, log_search_event, set_default_log_dir

__all__ = ["log_generation_event", "log_search_event", "set_default_log_dir"]
