def parse_csv(text: str) -> list[list[str]]:
    """Split CSV text into rows of trimmed fields.

    Handles double-quoted fields (commas, newlines and ``""`` escapes
    inside quotes) and both ``\\n`` and ``\\r\\n`` line endings. Rows whose
    fields are all empty are dropped. Unbalanced quotes never raise; the
    quote state simply toggles and whatever was read is returned.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False

    def end_row() -> None:
        row.append("".join(field).strip())
        if any(f != "" for f in row):
            rows.append(list(row))
        row.clear()
        field.clear()

    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if in_quotes:
            if c == '"':
                if i + 1 < n and text[i + 1] == '"':
                    field.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                field.append(c)
        elif c == '"':
            in_quotes = True
        elif c == ",":
            row.append("".join(field).strip())
            field.clear()
        elif c == "\n":
            end_row()
        elif c == "\r" and i + 1 < n and text[i + 1] == "\n":
            end_row()
            i += 1
        else:
            field.append(c)
        i += 1

    end_row()
    return rows
