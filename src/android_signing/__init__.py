"""
Android release signing configuration task collection
"""

from invoke import Collection

# Create namespace and collect tasks from each submodule
namespace = Collection()

from .build.tasks import signing

for task_name, task in Collection.from_module(signing).tasks.items():
    namespace.add_task(task)
