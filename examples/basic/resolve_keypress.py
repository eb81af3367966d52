"""Resolve a single = key press — pure function, zero deps."""

from smartequals import CursorContext, EqualsConfig, resolve

config = EqualsConfig(assignment_token="<- ")
ctx = CursorContext.from_text("x ", 2)
action = resolve(ctx, config)
print(action.to_dict())
print(action.apply("x ", 2))
