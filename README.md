# taskservice

A small HTTP service that keeps a list of tasks in an SQLite database and
exposes them through a JSON API.

Each task has an `id`, a `title`, an optional `description`, a `status`
(`new`, `in_progress` or `done`) and the `created_at` / `updated_at`
timestamps.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Configuration

Settings are read from a TOML file, `config.toml` in the current directory
unless another one is given with `--config`:

```toml
[logger]
level = 4               # 0 panic, 1 fatal, 2 error, 3 warning, 4 info, 5 debug, 6 trace

[db]
database = "tasks.db"   # path of the SQLite database file

[server]
address = "127.0.0.1:8080"
```

Missing keys fall back to `logger.level = 0` (critical messages only),
`db.database = "tasks.db"` and an empty server address. The server address
must end in `:<port>`; with no host part the server listens on `0.0.0.0`.
Log records are written to standard output as one JSON object per line.

## Command line

The package installs one command, `taskservice`, with two sub-commands.
Without a sub-command it prints its help.

Create the database tables if they are missing:

```
taskservice --config config.toml migrate
```

Start the HTTP server:

```
taskservice --config config.toml serve
```

`--config` may also be given after the sub-command. `serve` does not create
the tables, so run `migrate` first on a new database. A configuration file
that cannot be read, or an address that cannot be used, stops the command
with an error; a database error during `migrate` is logged.

## HTTP API

| Method   | Path           | Description                                       |
|----------|----------------|---------------------------------------------------|
| `GET`    | `/tasks`       | List all tasks, ordered by id.                    |
| `POST`   | `/tasks`       | Create a task; responds `201 Created`.            |
| `PUT`    | `/tasks/<id>`  | Replace a task's title, description and status.  |
| `DELETE` | `/tasks/<id>`  | Delete a task; responds `200` with an empty body. |

Creating a task:

```
POST /tasks
Content-Type: application/json

{"title": "Write report", "description": "Quarterly numbers"}
```

When `status` is left out on creation the task starts as `new`. An update
must always carry a `status`; an empty one is rejected with `400`.

Errors come back as JSON of the form `{"error": "..."}`:

- a task id that is not a number, a task that does not exist, an unknown
  status or a field of the wrong type gives `400 Bad Request`;
- a request body that is not sent as JSON gives `422 Unprocessable Entity`.

Every request is logged with its status code, method, path and duration.

## Using it from Python

The application can be built directly, for example to embed it or test it:

```python
from taskservice.app import create_app
from taskservice.dao import TasksDao
from taskservice.database import create_schema, init_database

db = init_database("tasks.db")
create_schema(db)
app = create_app(TasksDao(db))
```

`create_app()` without an argument uses the shared store returned by
`taskservice.dao.tasks()`, which is bound to the connection set with
`taskservice.database.init_database` or `set_database`; using it before a
connection is set raises `taskservice.database.DatabaseNotInitialized`.

The data layer can also be used on its own through `TasksDao` (`create`,
`list`, `update`, `delete`) and the `taskservice.model.Task` and
`taskservice.model.Status` types; a missing task raises
`taskservice.dao.TaskNotFound`.

## What it does not do

- `migrate` only creates the tables that are missing; there are no
  versioned migrations and no way to roll them back.
- `taskservice.model.Auth` and the `auth` table exist, but nothing reads or
  writes them: there is no authentication and no token endpoint.
- `serve` runs Flask's built-in development server; for production, serve
  the application returned by `create_app` with a WSGI server of your choice.