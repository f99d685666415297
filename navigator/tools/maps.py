import logging
from urllib.parse import quote

from langchain.tools import tool

from navigator.errors import InvalidArgument

logger = logging.getLogger(__name__)

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query={query}"

# Same set encodeURIComponent leaves alone; quote() already keeps "-_.~".
_UNRESERVED = "!*'()"


def google_maps_link(location_name: str) -> str:
    """Build a Google Maps search URL for a place name or a "lat,long" string."""
    if not location_name:
        raise InvalidArgument("Location name or coordinates are required to generate a Google Maps link.")
    return MAPS_SEARCH_URL.format(query=quote(location_name, safe=_UNRESERVED))


@tool
def get_google_maps_link(location_name: str) -> str:
    """
    Provide a Google Maps link for a location, point of interest, or coordinates.

    When to use:
    - The user asks for a map, directions, or to see where something is.
    - Examples: "Where is the Louvre Museum?", "Show me a map of Barcelona",
      or coordinates like "48.8584,2.2945" when a map of that area is needed.

    Input:
    - location_name: The name of the location or point of interest
      (e.g. "Eiffel Tower, Paris", "restaurants near Times Square, New York"),
      or comma-separated latitude and longitude (e.g. "48.8584,2.2945").
      Be as specific as possible.

    Output:
    - A Google Maps search URL, or a short explanation when no link could be built.
    """
    try:
        return google_maps_link(location_name)
    except InvalidArgument as e:
        logger.warning("Map link tool called without a usable location: %r", location_name)
        return f"No map link available: {e}"
