from .parser import parse_condition, tokenize
from .serializer import condition_to_string, conditions_to_strings
