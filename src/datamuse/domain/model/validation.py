"""Parameter compatibility rules for vocabularies and endpoints."""

from datamuse.domain.model.errors import EndPointError, VocabularyError
from datamuse.domain.model.query import (
    EndPoint,
    HintString,
    MaxResults,
    Parameter,
    Related,
    Vocabulary,
)

# Parameter kinds accepted by the suggest endpoint
SUGGEST_PARAMETERS = (MaxResults, HintString)


def validate_parameter(
    parameter: Parameter, vocabulary: Vocabulary, endpoint: EndPoint,
) -> None:
    """Check a single parameter against the request's vocabulary and endpoint.

    Rules are applied in order and the first violation is raised:
        1. Related is not available for the Spanish vocabulary.
        2. HintString is not allowed on the words endpoint.
        3. Only MaxResults and HintString are allowed on the suggest endpoint.

    Raises:
        VocabularyError: The vocabulary does not support the parameter.
        EndPointError: The endpoint does not support the parameter.
    """
    if isinstance(parameter, Related) and vocabulary is Vocabulary.SPANISH:
        raise VocabularyError(vocabulary.value, parameter.kind)

    if endpoint is EndPoint.WORDS and isinstance(parameter, HintString):
        raise EndPointError(endpoint.value, parameter.kind)

    if endpoint is EndPoint.SUGGEST and not isinstance(parameter, SUGGEST_PARAMETERS):
        raise EndPointError(endpoint.value, parameter.kind)
