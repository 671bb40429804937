
import streamlit as st
from health_dashboard.config import DATA_PATH
from health_dashboard.data.series import load_health_table


@st.cache_data
def load_all_data(path=DATA_PATH):
    return load_health_table(path)
