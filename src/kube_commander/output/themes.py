"""Status colour maps for kubectl table cells."""

STATUS_COLORS: dict[str, str] = {
    "Running": "green",
    "Succeeded": "green",
    "Completed": "green",
    "Active": "green",
    "Bound": "green",
    "Ready": "green",
    "Pending": "yellow",
    "ContainerCreating": "yellow",
    "PodInitializing": "yellow",
    "Terminating": "magenta",
    "Failed": "red bold",
    "Error": "red bold",
    "CrashLoopBackOff": "red bold",
    "ImagePullBackOff": "red",
    "ErrImagePull": "red",
    "OOMKilled": "red",
    "NotReady": "red",
    "Unknown": "red",
    "Evicted": "dim",
}

# Columns whose cells are coloured by STATUS_COLORS.
STATUS_COLUMNS: frozenset[str] = frozenset({"STATUS", "PHASE"})

COLUMN_STYLES: dict[str, str] = {
    "NAMESPACE": "blue",
    "NAME": "bold white",
    "AGE": "dim",
    "TYPE": "magenta",
    "CLUSTER-IP": "cyan",
    "EXTERNAL-IP": "cyan",
    "IP": "cyan",
    "NODE": "cyan",
}


def styled_status(status: str) -> str:
    color = STATUS_COLORS.get(status)
    if color is None:
        # "Init:0/1", "Init:CrashLoopBackOff" and friends
        base = status.split(":")[-1]
        color = STATUS_COLORS.get(base, "white")
    return f"[{color}]{status}[/{color}]"
