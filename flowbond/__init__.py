"""FlowBond venue ordering client.

Domain models shared by the cart, the API client and the Streamlit pages."""

__all__ = ["__version__"]

# Keep in sync with the version declared in ``pyproject.toml``
__version__ = "0.1.0"
