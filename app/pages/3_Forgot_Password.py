import streamlit as st
import sys, os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from health_dashboard.auth import validate_forgot

st.title("Forgot your password?")
st.caption("Password reset (demo only)")
st.write("Enter the email address associated with your account. In a real system, we would send you "
         "a link to reset your password. Here, this page is a front-end placeholder only.")

with st.form("forgot"):
    email = st.text_input("Email address", placeholder="you@example.com")
    submitted = st.form_submit_button("Send reset link (demo)")

if submitted:
    error = validate_forgot(email)
    if error:
        st.error(error)
    else:
        st.success(f"In a real application, a password reset email would now be sent to {email.strip()}.")
        st.page_link("pages/4_Reset_Password.py", label="Continue to reset password")

st.page_link("Home.py", label="Back to sign in")
