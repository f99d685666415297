"""HTTP helper used by the Streamlit chat page."""

import os
from dataclasses import dataclass, field
from typing import Optional

import requests

API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:8000")
UNAVAILABLE_MESSAGE = "Nizhal is unable to respond right now."


@dataclass
class ChatReply:
    answer: str = ""
    links: list[str] = field(default_factory=list)
    map_url: Optional[str] = None
    error: Optional[str] = None


def ask_navigator(query: str, location: Optional[dict] = None, base_url: str = API_BASE_URL) -> ChatReply:
    """POST the query to the API and turn every outcome into a :class:`ChatReply`."""
    try:
        resp = requests.post(
            f"{base_url}/chat",
            json={"query": query, "userLocation": location},
            timeout=90,
        )
        if resp.status_code == 503:
            return ChatReply(error=_unavailable_message(resp))
        resp.raise_for_status()
        data = resp.json()
        return ChatReply(answer=data["answer"], links=data.get("links", []), map_url=data.get("mapUrl"))
    except requests.exceptions.ConnectionError:
        return ChatReply(error="Could not reach the server. Is the API running?")
    except requests.exceptions.Timeout:
        return ChatReply(error="The request timed out. Please try again.")
    except requests.exceptions.HTTPError as e:
        return ChatReply(error=f"Server error ({e.response.status_code}). Please try again later.")
    except Exception as e:
        return ChatReply(error=f"Something went wrong: {e}")


def _unavailable_message(resp) -> str:
    try:
        return resp.json().get("error", UNAVAILABLE_MESSAGE)
    except ValueError:
        return UNAVAILABLE_MESSAGE
