from peewee import BooleanField, Database, Model, TextField, UUIDField

TABLE_NAME = "tasks"


class TaskModel(Model):
    id = UUIDField(primary_key=True)
    title = TextField(default="")
    description = TextField(default="")
    is_completed = BooleanField(default=False)

    class Meta:
        table_name = TABLE_NAME


def bind_task_model(db: Database) -> type[TaskModel]:
    """
    Devuelve una subclase de TaskModel enlazada a `db`.

    Cada repositorio usa su propia clase, sin modificar TaskModel.
    """

    class BoundTaskModel(TaskModel):
        class Meta:
            database = db
            table_name = TABLE_NAME

    return BoundTaskModel
