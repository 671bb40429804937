import streamlit as st
import sys, os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from health_dashboard.auth import passwords_mismatch, validate_reset

st.title("Reset your password")
st.caption("Reset password (demo only)")
st.write("In a real application, this page would be opened from a secure link sent to your email. "
         "Here, it is a front-end demo to complete the login / forgot / reset flow.")

with st.form("reset"):
    email = st.text_input("Email address", placeholder="you@example.com")
    new_password = st.text_input("New password", type="password", placeholder="Choose a new password")
    confirm = st.text_input("Confirm new password", type="password", placeholder="Re-enter your new password")
    submitted = st.form_submit_button("Reset password (demo)")

if passwords_mismatch(new_password, confirm):
    st.warning("Passwords do not match.")

if submitted:
    error = validate_reset(email, new_password, confirm)
    if error:
        st.error(error)
    else:
        st.success(f"In a real application, your password for {email.strip()} would now be updated. "
                   "Here it is only a UI demonstration and no data is stored.")

st.page_link("Home.py", label="Back to sign in")
