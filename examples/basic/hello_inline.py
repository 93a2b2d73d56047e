"""Parse one line of inline Markdown — zero config, zero deps."""

from delimit import parse_inline

for node in parse_inline("Hello *emphasis*, **strong** and `code`"):
    print(node)
