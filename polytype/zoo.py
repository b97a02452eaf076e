"""
The classic example programs, by name, in the order the driver runs them.
Some are meant to fail; the names say which way.
"""
from .syntax import Literal, Identifier, Lambda, Let, LetRec, call

def _pair_of_f_4_f_true():
	return call(Identifier("pair"), call(Identifier("f"), Literal(4)), call(Identifier("f"), Identifier("true")))

EXAMPLES = {
	"factorial": LetRec(
		"factorial",
		Lambda("n", call(
			Identifier("cond"),
			call(Identifier("zero"), Identifier("n")),
			Literal(1),
			call(
				Identifier("times"),
				Identifier("n"),
				call(Identifier("factorial"), call(Identifier("pred"), Identifier("n"))),
			),
		)),
		call(Identifier("factorial"), Literal(5)),
	),
	# fn x => (pair (x 3) (x true))
	"monomorphic_parameter": Lambda("x", call(
		Identifier("pair"),
		call(Identifier("x"), Literal(3)),
		call(Identifier("x"), Identifier("true")),
	)),
	"unbound_f": _pair_of_f_4_f_true(),
	"let_polymorphism": Let("f", Lambda("x", Identifier("x")), _pair_of_f_4_f_true()),
	"self_application": Lambda("f", call(Identifier("f"), Identifier("f"))),
	"constant_function": Let("g", Lambda("f", Literal(5)), call(Identifier("g"), Identifier("g"))),
	# fn g => let f = fn x => g in pair (f 3) (f true)
	"non_generic": Lambda("g", Let(
		"f",
		Lambda("x", Identifier("g")),
		call(
			Identifier("pair"),
			call(Identifier("f"), Literal(3)),
			call(Identifier("f"), Identifier("true")),
		),
	)),
	"composition": Lambda("f", Lambda("g", Lambda("arg", call(
		Identifier("g"), call(Identifier("f"), Identifier("arg"))
	)))),
	"apply_five": Lambda("f", call(Identifier("f"), Literal(5))),
	"apply_one": call(
		Lambda("y", call(Identifier("y"), Literal(1))),
		Lambda("x", Literal(1)),
	),
	"undefined_name": Identifier("undefined_name"),
}
