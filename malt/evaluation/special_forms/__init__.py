"""Registry of special forms for the malt evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Every handler takes the unevaluated tail of the form,
the current environment and the evaluator function.
"""

from malt.types.symbol import Symbol
from malt.evaluation.special_forms.define_form import define_form
from malt.evaluation.special_forms.do_form import do_form
from malt.evaluation.special_forms.fn_form import fn_form
from malt.evaluation.special_forms.if_form import if_form
from malt.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    Symbol("def!"): define_form,
    Symbol("let*"): let_form,
    Symbol("if"): if_form,
    Symbol("do"): do_form,
    Symbol("fn*"): fn_form,
}
