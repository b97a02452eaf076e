"""
Hindley-Milner type inference with let-polymorphism,
for a small functional language of literals, names, application,
lambda, let and letrec.
"""
