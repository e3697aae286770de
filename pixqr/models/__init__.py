"""
------------------------------------------------------------------------------
Project:        PixQR
File:           pixqr/models/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Package initializer for the codec data models. Exports the
                payment request, the TLV field tree and the service result.
------------------------------------------------------------------------------
"""

from .fields import EncodedField, Field, Group, Leaf
from .request import PaymentRequest, PixCode
