from .fun_fact import get_fun_fact
from .maps import get_google_maps_link

tools = [get_fun_fact, get_google_maps_link]
tools_by_name = {t.name: t for t in tools}

__all__ = ["tools", "tools_by_name", "get_fun_fact", "get_google_maps_link"]
