"""Services operating on the SBOL core data model.

Submodules are imported explicitly (``from sbolcore.services import precedence``)
because ``sbolcore.models`` depends on ``sbolcore.services.validation``.
"""
