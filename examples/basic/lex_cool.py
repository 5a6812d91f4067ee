"""Lex a COOL snippet and print the classic token listing."""

from coolex import format_listing, lex

source = 'class Main inherits IO {\n  main() : Object { out_string("Hello, World.\\n") };\n};\n'
print(format_listing(lex(source), source_file="hello.cl"), end="")
