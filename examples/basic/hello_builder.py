"""Build a string from text, characters and bytes, zero deps."""

from string_builder import Builder, Byte, Char

b = Builder()
b.append(Char.from_code_point(0x2018)).append("hello").append(Byte(0x2C))
b.append(b" world").append("’")
print(len(b), "bytes")
print(b.build())
