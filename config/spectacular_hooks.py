def group_tags(result, generator, request, public):
    """Normalize tags across the schema so each path family has a single tag."""
    patterns = [
        (lambda p: p.startswith("/api/v1/auth/jwt/"), "JWT Authentication"),
        (lambda p: p.startswith("/api/v1/auth/"), "Authentication"),
        (lambda p: p.startswith("/api/v1/users/"), "Users"),
        (lambda p: p.startswith("/api/v1/public/employees/"), "Public"),
        (lambda p: p.startswith("/api/v1/employees/"), "Employees"),
        (lambda p: p.startswith("/api/v1/tasks/"), "Tasks"),
        (lambda p: p.startswith("/api/v1/attendance/"), "Attendance"),
        (lambda p: p == "/api/v1/schema/", "Meta"),
    ]
    for path, operations in result.get("paths", {}).items():
        tag = None
        for pred, name in patterns:
            if pred(path):
                tag = name
                break
        if tag is None:
            continue
        for op in operations.values():
            op["tags"] = [tag]
    return result


def only_v1_endpoints(endpoints, **kwargs):
    """Document the /api/v1/ routes only; /api/ mirrors them for old clients."""
    return [endpoint for endpoint in endpoints if endpoint[0].startswith("/api/v1/")]
