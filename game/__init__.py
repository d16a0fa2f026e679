"""
Game package - application context, screen navigation and map session state.
"""
