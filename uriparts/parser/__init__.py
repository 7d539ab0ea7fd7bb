from . import chars, errors, models, uri_parser
from .chars import *  # NoQA
from .errors import *  # NoQA
from .models import *  # NoQA
from .uri_parser import *  # NoQA

__all__ = (chars.__all__ + errors.__all__ + models.__all__ +  # NoQA
           uri_parser.__all__)
