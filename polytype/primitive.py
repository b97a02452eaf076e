"""
Build the built-in environment the example programs run against.
"""
from .algebra import INT, BOOL, curried, function, pair
from .environment import TypeEnvironment

def environment() -> TypeEnvironment:
	env = TypeEnvironment()
	a, b, c = (env.fresh_variable() for _ in range(3))
	env["pair"] = curried(a, b, pair(a, b))
	env["true"] = BOOL
	env["cond"] = curried(BOOL, c, c, c)
	env["zero"] = function(INT, BOOL)
	env["pred"] = function(INT, INT)
	env["times"] = curried(INT, INT, INT)
	return env
