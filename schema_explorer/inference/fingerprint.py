import hashlib
import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


class FingerprintGrouper:
    """Clusters object descriptors that share the same set of field names.

    Clustering goes through a fingerprint -> descriptors mapping, so two
    descriptors with the same key set end up together even when objects of
    other shapes sit between them in the sample. Clusters come out in order of
    first appearance; descriptors keep their input order inside a cluster.
    """

    # Unit separator keeps {"ab", "c"} and {"a", "bc"} apart.
    SEPARATOR = "\x1f"

    @classmethod
    def fingerprint(cls, descriptor) -> str:
        names = sorted(set(descriptor.field_names()))
        joined = cls.SEPARATOR.join(names)
        return hashlib.sha256(joined.encode("utf-8")).hexdigest()

    @classmethod
    def group(cls, descriptors):
        clusters = defaultdict(list)
        for descriptor in descriptors:
            clusters[cls.fingerprint(descriptor)].append(descriptor)

        logger.debug(
            f"Grouped {len(descriptors)} objects into {len(clusters)} clusters"
        )
        return list(clusters.values())


def group(descriptors):
    return FingerprintGrouper.group(descriptors)
