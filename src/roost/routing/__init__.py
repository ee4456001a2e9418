"""Routing — ordered per-tenant route tables, pattern filters, and controllers.

Routes are registered during setup and read back, in registration order,
by the route listing.
"""
