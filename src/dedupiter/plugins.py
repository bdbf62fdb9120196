TRANSFORMS_EP = "dedupiter.transforms"
PREDICATES_EP = "dedupiter.predicates"
