
import streamlit as st
from health_dashboard.config import SESSION_USER_KEY
from health_dashboard.narrative.chat import ChatTranscript
from health_dashboard.state import DashboardState

STATE_KEY = "dashboard_state"
CHAT_KEY = "chat_transcript"


def get_state() -> DashboardState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState(username=st.session_state.get(SESSION_USER_KEY))
    return st.session_state[STATE_KEY]


def set_state(state: DashboardState):
    st.session_state[STATE_KEY] = state
    if state.username:
        st.session_state[SESSION_USER_KEY] = state.username
    else:
        st.session_state.pop(SESSION_USER_KEY, None)


def get_transcript() -> ChatTranscript:
    if CHAT_KEY not in st.session_state:
        st.session_state[CHAT_KEY] = ChatTranscript()
    return st.session_state[CHAT_KEY]
