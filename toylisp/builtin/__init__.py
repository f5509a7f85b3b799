from toylisp.builtin.env_builtin import register, make_global_env, define_primitive, PRIMITIVES

__all__ = ["register", "make_global_env", "define_primitive", "PRIMITIVES"]
