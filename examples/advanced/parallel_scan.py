"""One lexer per document — scan 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from fuzzyml import EventType, iter_events

docs = [f"<div id=d{i}><p>Content for document {i}</p><br/></div>" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(iter_events, docs))

print(f"Scanned {len(results)} documents in parallel")
print("Tags in first doc:", sum(1 for e in results[0] if e.type is EventType.TAG))
print("End tags in last doc:", sum(1 for e in results[-1] if e.type is EventType.END_TAG))
