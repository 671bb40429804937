
import streamlit as st
import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from health_dashboard.auth import validate_login
from utils.session import get_state, set_state


st.set_page_config(page_title='World Health Analytics Dashboard', layout='wide')

st.caption('Global Health Intelligence · Prototype – front-end only login')
st.title('World Health Analytics Dashboard')
st.markdown('''Sign in to explore birth rates, death rates and life expectancy trends using the cleaned world health dataset. This login is front-end only and is used to personalise the dashboard header.''')

state = get_state()

if state.username:
    st.success(f'Signed in as {state.username}')
    if st.button('Go to dashboard'):
        st.switch_page('pages/1_Dashboard.py')

with st.form('login'):
    st.subheader('Sign in')
    username = st.text_input('Username or Email', placeholder='john.doe@example.com')
    password = st.text_input('Password', type='password', placeholder='••••••••')
    submitted = st.form_submit_button('Sign in')

if submitted:
    error = validate_login(username, password)
    if error:
        st.error(error)
    else:
        set_state(state.sign_in(username))
        st.switch_page('pages/1_Dashboard.py')

st.sidebar.title('Navigation')
st.sidebar.info('New here? Use the Register page. Forgot your password? Use Forgot / Reset Password.')
