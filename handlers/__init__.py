"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler parses the command, calls SavePetService,
and replies with text built by `handlers.messages`.
No business logic lives here.
"""
