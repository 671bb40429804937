import streamlit as st
import sys, os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from health_dashboard.auth import passwords_mismatch, validate_registration

st.title("Create an account")
st.caption("Registration (front-end only)")
st.write("This is a demo registration screen to show the flow. No data is stored or sent to a server. "
         "In a real system, these details would be validated and saved securely.")

with st.form("register"):
    full_name = st.text_input("Full name", placeholder="John Doe")
    email = st.text_input("Email address", placeholder="you@example.com")
    password = st.text_input("Password", type="password", placeholder="Choose a secure password")
    confirm = st.text_input("Confirm password", type="password", placeholder="Re-enter your password")
    submitted = st.form_submit_button("Create account (demo)")

if passwords_mismatch(password, confirm):
    st.warning("Passwords do not match.")

if submitted:
    error = validate_registration(full_name, email, password, confirm)
    if error:
        st.error(error)
    else:
        st.success(f"Thanks, {full_name.strip()}! In a real application an account for {email.strip()} "
                   "would now be created. Go back to sign in to continue.")

st.page_link("Home.py", label="Back to sign in")
