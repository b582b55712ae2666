"""
MCP tools for Copilot Plus.
"""
