from __future__ import annotations
import os

# Progress logging (set FINGERS_VERBOSE=1 to enable)
VERBOSE = os.environ.get("FINGERS_VERBOSE") == "1"


class ConfigurationError(ValueError):
    """Fatal setup problem; raised before any text is scanned."""


# /* ~~~ keyboard layouts: most comfortable keys first ~~~ */
ALPHABETS: dict[str, str] = {
    "qwerty": "asdfqwerzxcvjklmiuopghtybn",
    "qwerty-homerow": "asdfjklgh",
    "qwerty-left-hand": "asdfqwerzcxv",
    "qwerty-right-hand": "jkluiopmyhn",
    "azerty": "qsdfazerwxcvjklmuiopghtybn",
    "azerty-homerow": "qsdfjkmgh",
    "azerty-left-hand": "qsdfazerwxcv",
    "azerty-right-hand": "jklmuiophyn",
    "qwertz": "asdfqweryxcvjkluiopmghtzbn",
    "qwertz-homerow": "asdfghjkl",
    "qwertz-left-hand": "asdfqweryxcv",
    "qwertz-right-hand": "jkluiopmhzn",
    "dvorak": "aoeuqjkxpyhtnsgcrlmwvzfidb",
    "dvorak-homerow": "aoeuhtnsid",
    "dvorak-left-hand": "aoeupqjkyix",
    "dvorak-right-hand": "htnsgcrlmwvz",
    "colemak": "arstqwfpzxcvneioluymdhgjbk",
    "colemak-homerow": "arstneiodh",
    "colemak-left-hand": "arstqwfpzxcv",
    "colemak-right-hand": "neioluymjhk",
}

DEFAULT_LAYOUT: str = "qwerty"

# named group that selects the highlighted part of a match
HIGHLIGHT_GROUP: str = "match"

_KUBERNETES = (
    r"(deployment\.app|binding|componentstatuse|configmap|endpoint|event|"
    r"limitrange|namespace|node|persistentvolumeclaim|persistentvolume|pod|"
    r"podtemplate|replicationcontroller|resourcequota|secret|serviceaccount|"
    r"service|mutatingwebhookconfiguration\.admissionregistration\.k8s\.io|"
    r"validatingwebhookconfiguration\.admissionregistration\.k8s\.io|"
    r"customresourcedefinition\.apiextension\.k8s\.io|"
    r"apiservice\.apiregistration\.k8s\.io|controllerrevision\.apps|"
    r"daemonset\.apps|deployment\.apps|replicaset\.apps|statefulset\.apps|"
    r"tokenreview\.authentication\.k8s\.io|"
    r"localsubjectaccessreview\.authorization\.k8s\.io|"
    r"selfsubjectaccessreviews\.authorization\.k8s\.io|"
    r"selfsubjectrulesreview\.authorization\.k8s\.io|"
    r"subjectaccessreview\.authorization\.k8s\.io|"
    r"horizontalpodautoscaler\.autoscaling|cronjob\.batch|job\.batch|"
    r"certificatesigningrequest\.certificates\.k8s\.io|"
    r"events\.events\.k8s\.io|daemonset\.extensions|deployment\.extensions|"
    r"ingress\.extensions|networkpolicies\.extensions|"
    r"podsecuritypolicies\.extensions|replicaset\.extensions|"
    r"networkpolicie\.networking\.k8s\.io|"
    r"poddisruptionbudget\.policy|"
    r"clusterrolebinding\.rbac\.authorization\.k8s\.io|"
    r"clusterrole\.rbac\.authorization\.k8s\.io|"
    r"rolebinding\.rbac\.authorization\.k8s\.io|"
    r"role\.rbac\.authorization\.k8s\.io|"
    r"storageclasse\.storage\.k8s\.io)"
    r"[a-zA-Z0-9_#$%&+=/@-]+"
)

# /* ~~~ builtin patterns; declaration order == priority (first wins) ~~~ */
BUILTIN_PATTERNS: dict[str, str] = {
    "ip": r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}",
    "uuid": r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    "url": r"((https?://|git@|git://|ssh://|ftp://|file:///)[^\s()\x22']+)",
    "git-status": r"(modified|deleted|deleted by us|new file): +(?P<match>.+)",
    "git-status-branch": r"Your branch is up to date with '(?P<match>.*)'\.",
    "diff": r"(---|\+\+\+) [ab]/(?P<match>.*)",
    "kubernetes": _KUBERNETES,
    "path": r"(([.\w\-~\$@]+)?(/[.\w\-@]+)+/?)",
    "hex": r"(0x[0-9a-fA-F]+)",
    "sha": r"[0-9a-f]{7,128}",
    "digit": r"[0-9]{4,}",
}

# user patterns are read from pattern_0 .. pattern_{MAX_USER_PATTERNS - 1}
MAX_USER_PATTERNS: int = 20

# seconds one pattern may spend on a capture before it is given up on
PATTERN_TIMEOUT: float = float(os.environ.get("FINGERS_PATTERN_TIMEOUT", "1.0"))
