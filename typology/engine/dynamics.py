"""Type dynamics: the ordered function stack and the rational/irrational split.

The interaction of two, three or four preferences is known as type
dynamics. The dominant function tends to be evident earliest in life, the
auxiliary during the teenage years (balancing the dominant), the tertiary
around mid life; the inferior is the least differentiated.
"""

from ..core.dichotomies import opposite
from ..core.errors import DerivationError
from ..core.models import AttitudeFunction, FunctionStack, Ratio
from .graph import rule


# =============================================================================
# Extraverted / introverted functions
# =============================================================================


@rule()
def preferred_letter(lifestyle):
    """Lifestyle letter flipped through the dichotomy table.

    J marks a perceiving-led lifestyle (P), P a judging-led one (J).
    """
    return opposite(lifestyle)


@rule()
def extraverted_function(preferred_letter, perceiving_letter, judging_letter):
    """Function paired with the extraverted attitude.

    A P lifestyle shows its perceiving function (S-N) to the outer world,
    a J lifestyle its judging function (T-F).
    """
    if preferred_letter == "J":
        return perceiving_letter
    if preferred_letter == "P":
        return judging_letter
    raise DerivationError(
        f"No lifestyle marker for preferred letter {preferred_letter!r}"
    )


@rule()
def introverted_function(extraverted_function, perceiving_letter, judging_letter):
    """Function paired with the introverted attitude."""
    if extraverted_function == perceiving_letter:
        return judging_letter
    return perceiving_letter


# =============================================================================
# Function stack
# =============================================================================


@rule()
def dominant(
    is_introvert,
    is_extravert,
    is_judging_lifestyle,
    is_perceiving_lifestyle,
    perceiving_letter,
    judging_letter,
):
    """The dominant function.

    The lifestyle picks the kind of function and the attitude its
    orientation:

        P, I -> perceiving function, introverted
        J, E -> judging function, extraverted
        P, E -> perceiving function, extraverted
        J, I -> judging function, introverted
    """
    if is_introvert == is_extravert:
        raise DerivationError(
            f"Attitude predicates disagree (introvert={is_introvert}, "
            f"extravert={is_extravert})"
        )
    if is_judging_lifestyle == is_perceiving_lifestyle:
        raise DerivationError(
            f"Lifestyle predicates disagree (judging={is_judging_lifestyle}, "
            f"perceiving={is_perceiving_lifestyle})"
        )

    if is_perceiving_lifestyle and is_introvert:
        return AttitudeFunction(function=perceiving_letter, attitude="I")
    if is_judging_lifestyle and is_extravert:
        return AttitudeFunction(function=judging_letter, attitude="E")
    if is_perceiving_lifestyle and is_extravert:
        return AttitudeFunction(function=perceiving_letter, attitude="E")
    return AttitudeFunction(function=judging_letter, attitude="I")


@rule()
def auxiliary(dominant, perceiving_letter, judging_letter):
    """The other middle-letter function, in the opposite attitude.

    For an extravert the auxiliary is experienced introverted, for an
    introvert extraverted.
    """
    if dominant.function == judging_letter:
        function = perceiving_letter
    elif dominant.function == perceiving_letter:
        function = judging_letter
    else:
        raise DerivationError(
            f"Dominant function {dominant.function!r} is neither "
            f"{perceiving_letter!r} nor {judging_letter!r}"
        )
    return AttitudeFunction(function=function, attitude=opposite(dominant.attitude))


@rule()
def tertiary(attitude, auxiliary):
    """The opposite preference from the auxiliary.

    If the auxiliary is thinking the tertiary is feeling. Its attitude is
    debated and not normally indicated: an auxiliary of Te gives a tertiary
    of F (not Fe or Fi). The code's attitude letter is carried unresolved.
    """
    return AttitudeFunction(
        function=opposite(auxiliary.function), attitude=attitude, resolved=False
    )


@rule()
def inferior(dominant):
    """The opposite preference and attitude from the dominant.

    An ESTJ with dominant Te has an inferior of Fi.
    """
    return AttitudeFunction(
        function=opposite(dominant.function), attitude=opposite(dominant.attitude)
    )


@rule()
def function_stack(dominant, auxiliary, tertiary, inferior):
    return FunctionStack(
        dominant=dominant, auxiliary=auxiliary, tertiary=tertiary, inferior=inferior
    )


# =============================================================================
# Rational / irrational
# =============================================================================


@rule()
def prefers_rational(lifestyle):
    return lifestyle == "J"


@rule()
def prefers_irrational(prefers_rational):
    return not prefers_rational


@rule()
def ratio(prefers_rational):
    return Ratio.RATIONAL if prefers_rational else Ratio.IRRATIONAL


DYNAMICS_RULES = (
    preferred_letter,
    extraverted_function,
    introverted_function,
    dominant,
    auxiliary,
    tertiary,
    inferior,
    function_stack,
    prefers_rational,
    prefers_irrational,
    ratio,
)
