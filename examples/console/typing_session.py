"""Simulate typing into an R console with smart-equals enabled."""

from smartequals import ConfigStack, SmartEqualsMode, TextBuffer

mode = SmartEqualsMode(ConfigStack())
mode.enable()

# Output above the prompt is not editable: narrow to the process mark
buf = TextBuffer("> x <- 1\n[1] 1\n> ")
with buf.narrow(len(buf.text)):
    buf.insert("y ")
    mode.press(buf)  # y <-
    print(repr(buf.text))

    buf.insert("f(a")
    mode.press(buf)  # literal = for the argument
    buf.insert("1) ")
    mode.press(buf)
    mode.press(buf)  # second press turns <- into ==
    print(repr(buf.text))

mode.disable()
print("restored token:", repr(mode.config.assignment_token))
