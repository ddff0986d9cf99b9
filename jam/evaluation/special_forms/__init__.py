"""Registry of special forms for the Jam evaluator.

Maps syntax node classes to handler functions for the constructs that do not
simply evaluate all of their subexpressions. The evaluator consults this table
after handling constants, variables, operators and applications.
"""

from jam.reader.ast import If, Let, Map
from jam.evaluation.special_forms.if_form import if_form
from jam.evaluation.special_forms.let_form import let_form
from jam.evaluation.special_forms.map_form import map_form

SPECIAL_FORMS = {
    If: if_form,
    Let: let_form,
    Map: map_form,
}
