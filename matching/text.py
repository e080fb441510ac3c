import re
from typing import List

# Common English function words dropped during tokenization
STOPWORDS = frozenset(
    "a,about,above,after,again,against,all,am,an,and,any,are,as,at,be,"
    "because,been,before,being,below,between,both,but,by,could,did,do,does,"
    "doing,down,during,each,few,for,from,further,had,has,have,having,he,her,"
    "here,hers,him,his,how,i,if,in,into,is,it,its,itself,just,me,more,most,"
    "my,myself,no,nor,not,of,off,on,once,only,or,other,ought,our,ours,ourselves,"
    "out,over,own,same,she,should,so,some,such,than,that,the,their,theirs,them,"
    "themselves,then,there,these,they,this,those,through,to,too,under,until,up,"
    "very,was,we,were,what,when,where,which,while,who,whom,why,with,would,you,"
    "your,yours,yourself,yourselves".split(",")
)

_CURLY_QUOTES_RE = re.compile("[‘’“”]")
# keep letters, digits, whitespace, +, #, - and _
_DISALLOWED_RE = re.compile(r"[^a-z0-9\s+#\-_]")
_DIGITS_RE = re.compile(r"[0-9]+")


def normalize_text(text) -> str:
    """Lower-case text, flatten curly quotes and blank out punctuation."""
    if not text:
        return ""
    text = text.lower()
    text = _CURLY_QUOTES_RE.sub("'", text)
    return _DISALLOWED_RE.sub(" ", text)


def tokenize(text, min_len: int = 2) -> List[str]:
    """
    Split text into filtered tokens.

    Drops fragments shorter than ``min_len``, stopwords and pure numbers.
    Order and duplicates are preserved.
    """
    if min_len < 1:
        raise ValueError("min_len must be >= 1")

    tokens = []
    for part in normalize_text(text).split():
        if len(part) < min_len:
            continue
        if part in STOPWORDS:
            continue
        if _DIGITS_RE.fullmatch(part):
            continue
        tokens.append(part)
    return tokens
