"""Independent lexing passes in parallel, one Lexer per document."""

from concurrent.futures import ThreadPoolExecutor

from pipemark import LexError, error_to_dict, tokenize

docs = ["Doc " + str(i) + "\n\n|m a\\_" + str(i) + "|" for i in range(1000)]
docs.append("broken |m /* never closed")


def lex(source: str) -> dict:
    try:
        return {"tokens": len(tokenize(source))}
    except LexError as err:
        return {"error": error_to_dict(err)}


with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lex, docs))

print(f"Tokenized {len(results)} documents in parallel")
print("Failures:", [r["error"]["message"] for r in results if "error" in r])
