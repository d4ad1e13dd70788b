"""Service layer: caller-side policy on top of the domain validator.

Services return :class:`~unitrules.services.result.ServiceResult` and never raise
for invalid input.
"""
