"""
Core package for the grocery order bot
Contains configuration, errors, command parsing and the conversation state machine
"""
