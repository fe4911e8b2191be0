"""Show how build() reports bytes that are not valid UTF-8."""

from string_builder import Builder, InvalidEncodingError

b = Builder().append("caf").append(b"\xe9")  # latin-1, not UTF-8
try:
    b.build()
except InvalidEncodingError as e:
    print(e)
    print("valid prefix:", e.raw[: e.valid_up_to].decode("utf-8"))
