"""Grammar literals for DID URLs."""

DID_SCHEME = "did"
DID_PREFIX = f"{DID_SCHEME}:"

PARAM_SEP = ";"
PATH_SEP = "/"
QUERY_SEP = "?"
QUERY_PARAM_SEP = "&"
FRAGMENT_SEP = "#"
VALUE_SEP = "="

# a relative DID URL without any of these is a plain fragment
URL_SEPARATORS = (":", PARAM_SEP, PATH_SEP, QUERY_SEP, FRAGMENT_SEP)

# characters that would change how a formatted component is split again
PARAM_NAME_RESERVED = (PARAM_SEP, PATH_SEP, QUERY_SEP, FRAGMENT_SEP, VALUE_SEP)
PARAM_VALUE_RESERVED = (PARAM_SEP, PATH_SEP, QUERY_SEP, FRAGMENT_SEP)
QUERY_NAME_RESERVED = (QUERY_PARAM_SEP, FRAGMENT_SEP, VALUE_SEP)
QUERY_VALUE_RESERVED = (QUERY_PARAM_SEP, FRAGMENT_SEP)
PATH_RESERVED = (QUERY_SEP, FRAGMENT_SEP)
DID_RESERVED = (PARAM_SEP, PATH_SEP, QUERY_SEP, FRAGMENT_SEP)
