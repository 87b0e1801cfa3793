"""
repositories/ - Data Access Layer
==================================
One repository per table, each returning domain model objects.
`state_store` composes them into the per-user state the services work on.
"""
