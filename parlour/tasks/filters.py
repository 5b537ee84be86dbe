import django_filters

from parlour.tasks.models import Task


class TaskFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Task.Status.choices)
    is_active = django_filters.BooleanFilter(field_name="is_active")

    class Meta:
        model = Task
        fields = ["status", "is_active"]
