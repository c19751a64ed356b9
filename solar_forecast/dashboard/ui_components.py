# solar_forecast/dashboard/ui_components.py

import streamlit as st

from solar_forecast.dashboard.utils import format_slider_value, get_ui_logger
from solar_forecast.state.app_state import AppState, with_input
from solar_forecast.utils.config_loader import InputsConfig

# ==========================================================
# Logging configuration
# ==========================================================
logger = get_ui_logger(__name__)

# ==========================================================
# Sidebar UI Components Class
# ==========================================================
class SidebarUI:
    """
    Handles the Streamlit sidebar controls of the dashboard.

    Features:
    - One range slider per configured weather input
    - "Generate Prediction" button
    """

    def __init__(self, inputs_config: InputsConfig):
        self.inputs_config = inputs_config
        self.predict_clicked: bool = False

    # ==========================================================
    # Render sidebar components
    # ==========================================================
    def render(self, state: AppState) -> tuple[AppState, bool]:
        """
        Render the sidebar and fold slider positions into the state.

        Args:
            state (AppState): State before this render.

        Returns:
            tuple: (updated_state, predict_clicked)
        """
        st.sidebar.title("Input Parameters")

        for name, slider in self.inputs_config.sliders.items():
            current = getattr(state.inputs, name)
            value = st.sidebar.slider(
                f"{slider.label} ({slider.unit})",
                min_value=float(slider.min_value),
                max_value=float(slider.max_value),
                value=float(current),
                step=float(slider.step),
                key=f"slider_{name}",
            )
            st.sidebar.caption(format_slider_value(value, slider.unit))

            updated = with_input(state, name, value)
            if updated is not state:
                logger.info(f"Input '{name}' set to {value}")
                state = updated

        self.predict_clicked = st.sidebar.button(
            "☀️ Generate Prediction", use_container_width=True
        )
        if self.predict_clicked:
            logger.info("Generate Prediction pressed")

        return state, self.predict_clicked


# ==========================================================
# Function to initialize and render sidebar
# ==========================================================
def render_sidebar(state: AppState, inputs_config: InputsConfig) -> tuple[AppState, bool]:
    """
    Helper function to render the sidebar and return current selections.

    Returns:
        tuple: (updated_state, predict_clicked)
    """
    sidebar = SidebarUI(inputs_config)
    return sidebar.render(state)
