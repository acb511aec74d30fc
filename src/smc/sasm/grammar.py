''' Operand and label grammar '''

import pyparsing as pp

import smc.common.ops as ops
from smc.common.hwconf import LABEL_MARKER

dec_const = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))

# Ranges are checked by the factory, the grammar only recognises decimals
register = dec_const
channel = dec_const
s_const = dec_const

condition = pp.one_of(list(ops.CONDITIONS)).set_parse_action(lambda r: ops.CONDITIONS[r[0]])

# Anything non-blank, inner spaces allowed
label_name = pp.Regex(r'\S(.*\S)?')
label = pp.Suppress(LABEL_MARKER) + label_name
label_ref = pp.Optional(pp.Suppress(LABEL_MARKER)) + label_name


def parse_token(element: pp.ParserElement, token: str):
    return element.parse_string(token, parse_all=True)[0]
