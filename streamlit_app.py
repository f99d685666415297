import streamlit as st

from navigator.ui_client import ask_navigator

st.title("Nizhal Navigator")

# Initialise session state
if "messages" not in st.session_state:
    st.session_state.messages = []

# Sidebar controls
if st.sidebar.button("New chat"):
    st.session_state.messages = []
    st.rerun()

share_location = st.sidebar.toggle("Share my location", value=False)
location = None
if share_location:
    latitude = st.sidebar.number_input("Latitude", min_value=-90.0, max_value=90.0, value=48.8584, format="%.4f")
    longitude = st.sidebar.number_input("Longitude", min_value=-180.0, max_value=180.0, value=2.2945, format="%.4f")
    location = {"latitude": latitude, "longitude": longitude}
else:
    st.sidebar.caption("Without a location, name a city or region for 'nearby' questions.")


def render_extras(msg):
    """Render the map link and recommended links under an assistant message."""
    if msg.get("map_url"):
        st.markdown(f":world_map: [Open in Google Maps]({msg['map_url']})")
    if msg.get("links"):
        st.markdown("**Further reading**")
        for link in msg["links"]:
            st.markdown(f"- {link}")


# ── Chat history ─────────────────────────────────────────────────────────────

for msg in st.session_state.messages:
    with st.chat_message(msg["role"]):
        st.markdown(msg["content"])
        render_extras(msg)

# ── Chat input ───────────────────────────────────────────────────────────────

if prompt := st.chat_input("Hello! I am here for you", max_chars=500):
    st.session_state.messages.append({"role": "user", "content": prompt})
    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner("Thinking…"):
            reply = ask_navigator(prompt, location)

        if reply.error:
            st.error(reply.error)
        else:
            msg = {"role": "assistant", "content": reply.answer, "links": reply.links, "map_url": reply.map_url}
            st.markdown(reply.answer)
            render_extras(msg)
            st.session_state.messages.append(msg)
