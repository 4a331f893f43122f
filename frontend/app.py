import html
import os

import pydeck as pdk
import streamlit as st

from greeter_client import GreeterApi, GreeterSession

# Page configuration
st.set_page_config(
    page_title="Interactive Weather Greeter",
    page_icon="🌤️",
    layout="centered"
)

# Backend API configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")

DEFAULT_CENTER = (40.7128, -74.0060)  # New York City
GRADIENT = "linear-gradient(to bottom right, rgb(219 234 254), rgb(224 242 254), rgb(224 231 255))"

ss = st.session_state


def _query_coordinates():
    """Browser-supplied position, passed in as ?lat=..&lon=.."""
    try:
        return float(st.query_params["lat"]), float(st.query_params["lon"])
    except (KeyError, ValueError):
        return None


# Initialize session state
if "greeter" not in ss:
    ss.greeter = GreeterSession(GreeterApi(BACKEND_URL))
    coords = _query_coordinates()
    if coords:
        ss.greeter.select_location(*coords)
    else:
        ss.greeter.geolocation_unavailable()

greeter: GreeterSession = ss.greeter

background = f"url({greeter.background_image})" if greeter.background_image else GRADIENT
st.markdown(f"""
<style>
    .stApp {{
        background-image: {background};
        background-size: cover;
        background-position: center;
        background-repeat: no-repeat;
    }}
    .main-header {{
        font-size: 2.5rem;
        color: #1E88E5;
        text-align: center;
        padding: 1rem 0;
        font-weight: bold;
    }}
    .greeting-box {{
        padding: 1rem 1.5rem;
        border-radius: 0.5rem;
        background: linear-gradient(to right, #3b82f6, #0ea5e9, #6366f1);
        color: white;
        font-size: 1.5rem;
        text-align: center;
    }}
</style>
""", unsafe_allow_html=True)

# Header
st.markdown('<div class="main-header">Interactive Weather Greeter</div>', unsafe_allow_html=True)

if not greeter.api.is_healthy():
    st.warning("⚠️ Backend is not running. Please start the backend server first.")
    st.code("cd backend && python run.py", language="bash")

with st.container(border=True):
    if greeter.location_error:
        st.error(greeter.location_error)
    else:
        # Location Information
        if greeter.location:
            loc = greeter.location
            st.subheader(loc["city"])
            if loc.get("display_name"):
                st.caption(loc["display_name"])
            coords = loc["coordinates"]
            st.caption(f"{coords['latitude']:.4f}°N, {coords['longitude']:.4f}°E")
        else:
            st.caption("Loading location...")

        # Weather Information
        cols = st.columns(3)
        labels = (("temperature", "Temperature"), ("wind_speed", "Wind Speed"), ("humidity", "Humidity"))
        for col, (field, label) in zip(cols, labels):
            with col:
                if greeter.weather:
                    st.metric(label, greeter.weather[field])
                else:
                    st.metric(label, "…")

        # Enter in the name field submits the form, same as Send
        with st.form("greet", border=False):
            name_col, send_col = st.columns([4, 1])
            with name_col:
                name = st.text_input("Your name", placeholder="Enter your name", label_visibility="collapsed")
            with send_col:
                submitted = st.form_submit_button("Send", use_container_width=True)
        if submitted:
            with st.spinner("Generating greeting..."):
                greeter.submit_name(name)

        if greeter.greeting:
            st.markdown(f'<div class="greeting-box">{html.escape(greeter.greeting)}</div>', unsafe_allow_html=True)
            if st.button("🔄 Refresh greeting"):
                with st.spinner("Generating greeting..."):
                    greeter.generate_greeting(manual=True)
                st.rerun()

        if greeter.photo_source:
            st.caption(f"Background photo near {greeter.photo_source}")

# Map
if greeter.location:
    center = (
        greeter.location["coordinates"]["latitude"],
        greeter.location["coordinates"]["longitude"],
    )
else:
    center = DEFAULT_CENTER

marker = pdk.Layer(
    "ScatterplotLayer",
    data=[{"lat": center[0], "lon": center[1]}],
    get_position="[lon, lat]",
    get_radius=60,
    get_fill_color=[30, 136, 229, 200],
)
st.pydeck_chart(pdk.Deck(
    map_provider="carto",
    map_style="light",
    initial_view_state=pdk.ViewState(latitude=center[0], longitude=center[1], zoom=13, pitch=0),
    layers=[marker],
))

with st.form("pick_location"):
    lat_col, lon_col = st.columns(2)
    with lat_col:
        pick_lat = st.number_input("Latitude", -90.0, 90.0, float(center[0]), format="%.4f")
    with lon_col:
        pick_lon = st.number_input("Longitude", -180.0, 180.0, float(center[1]), format="%.4f")
    if st.form_submit_button("Show weather here"):
        greeter.select_location(pick_lat, pick_lon)
        st.rerun()

st.caption("Pick any point to update the weather location")

# Debounced greeting: the placeholder call between sleep slices is where
# Streamlit stops this run when the visitor interacts again
if greeter.seconds_until_greeting() is not None:
    pulse = st.empty()
    with st.spinner("Generating greeting..."):
        sent = greeter.wait_for_scheduled_greeting(tick=pulse.empty)
    if sent:
        st.rerun()
