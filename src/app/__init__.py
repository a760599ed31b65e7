"""
Top-level Streamlit app package.

This package hosts the interactive catalog explorer (Streamlit) decoupled from the
catx.* library modules. Chart builders remain under catx.viz; the Streamlit UI shell
and app-specific helpers live here.

CLI entrypoint (configured in pyproject.toml):
    catx-app = app.main:main
"""
