from prova import config
from prova.errors import InvalidParameters
from prova.models.parameters import DomainParameters

# RFC 2409 Oakley group 2 (1024-bit safe prime); 2 generates the subgroup
# of quadratic residues, whose order is (p - 1) / 2
p_hex = """
FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1
29024E088A67CC74020BBEA63B139B22514A08798E3404DD
EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245
E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED
EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE65381
FFFFFFFFFFFFFFFF
"""

oakley_p = int(p_hex.replace('\n', '').replace(' ', ''), 16)

GROUPS = {
    # 5 is a primitive root mod 23, so q = p - 1
    "demo": (23, 5, 22),
    # 23 = 2 * 11 + 1 and 4 = 2^2 generates the subgroup of prime order 11
    "subgroup": (23, 4, 11),
    "oakley1024": (oakley_p, 2, (oakley_p - 1) // 2),
}


def get_encrypting_values(name: str = config.DEFAULT_GROUP):
    """Returns the raw (p, g, q) triple of a named group."""
    try:
        return GROUPS[name]
    except KeyError:
        raise InvalidParameters(f"Unknown group '{name}', expected one of: {', '.join(sorted(GROUPS))}")


def get_domain_parameters(name: str = config.DEFAULT_GROUP) -> DomainParameters:
    p, g, q = get_encrypting_values(name)
    return DomainParameters(p, g, q)
