"""Single-pass tool-routing agent built on LangGraph."""
