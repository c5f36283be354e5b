"""Entry points: CLI and Streamlit interface."""
