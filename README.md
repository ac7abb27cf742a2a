# oslabsim

Small, self-contained simulations of the algorithms that make up a typical
operating-systems course. Each one takes plain Python values, such as lists of
burst times, reference strings or block sizes, and returns structured results
that you can inspect or render as text.

## What is included

| Module | Covers |
| --- | --- |
| `oslabsim.cpu_scheduling` | FCFS, SJF, preemptive priority and round robin (`fcfs`, `sjf`, `priority_preemptive`, `round_robin`) returning a `Schedule` |
| `oslabsim.paging` | FIFO, LRU and optimal page replacement (`fifo`, `lru`, `optimal`), `count_faults`, `format_trace` |
| `oslabsim.bankers` | `need_matrix`, `safe_sequence` and `format_need` for the Banker's algorithm |
| `oslabsim.memory` | `first_fit`, `best_fit`, `worst_fit`, `fixed_partition_first_fit`, `format_allocation` |
| `oslabsim.disk_scheduling` | FCFS, SCAN and C-SCAN (`fcfs`, `scan`, `cscan`) returning a `SeekResult` |
| `oslabsim.file_allocation` | A `Disk` with sequential, indexed and linked allocation |
| `oslabsim.directory` | `SingleLevelDirectory` and `TwoLevelDirectory` |
| `oslabsim.synchronization` | `MutexResource`, `ReaderWriterResource`, `BoundedBuffer`, `producer_consumer_run`, `dining_philosophers`, `sequential_threads_demo`, `run_threads` |
| `oslabsim.ipc` | `shared_memory_exchange` and `message_queue_exchange` between threads |
| `oslabsim.files` | `EmployeeFile` of fixed-size `Employee` records, `copy_file`, `file_management_demo`, `Permissions`, `SequentialRecords`, `system_call_demo` |
| `oslabsim.unix_commands` | Simplified `grep` and `ls` over in-memory lists |

## Installation

```
pip install .
```

Python 3.10 or newer is required. The package has no third-party dependencies.

## Usage

CPU scheduling (all processes arrive at time zero):

```python
from oslabsim.cpu_scheduling import sjf

schedule = sjf([8, 6, 4, 2])
print(schedule.format_table())
print(schedule.average_waiting())      # 5.0
print(schedule.average_turnaround())   # 10.0
```

Page replacement:

```python
from oslabsim.paging import fifo, lru, optimal, count_faults, format_trace

reference = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]
print(count_faults(fifo(reference, 3)))     # 15
print(count_faults(lru(reference, 3)))      # 12
print(count_faults(optimal(reference, 3)))  # 9
print(format_trace(lru(reference, 3)))
```

Disk scheduling:

```python
from oslabsim.disk_scheduling import fcfs, scan

result = fcfs([55, 58, 39, 18, 90], 50)
print(result.format_sequence())   # 50 -> 55 -> 58 -> 39 -> 18 -> 90
print(result.average())           # 24.0

sweep = scan([55, 58, 39, 18, 90], 50, 200, upward=True)
print(sweep.format_sequence())
print(sweep.total)                # 348
```

Memory allocation (block numbers are 0-based; `None` means not allocated):

```python
from oslabsim.memory import best_fit, format_allocation

processes = [212, 417, 112]
allocation = best_fit([100, 500, 200, 300], processes)
print(allocation)                              # [3, 1, 2]
print(format_allocation(processes, allocation))
```

File allocation on a simulated disk:

```python
from oslabsim.file_allocation import Disk, AllocationError

disk = Disk(16)
disk.allocate_linked([2, 5, 7, 9])
print(disk.chain(2))          # [2, 5, 7, 9]
print(disk.format_status())

try:
    disk.allocate_sequential(4, 3)   # block 5 is already taken
except AllocationError as exc:
    print(exc)
```

Deadlock avoidance:

```python
from oslabsim.bankers import need_matrix, safe_sequence, format_need

allocation = [[1, 1, 2, 4], [2, 2, 6, 5], [0, 2, 3, 5], [2, 5, 8, 6]]
maximum = [[1, 2, 5, 4], [0, 4, 8, 5], [3, 6, 9, 5], [1, 4, 8, 9]]
print(format_need(need_matrix(allocation, maximum)))
print(safe_sequence(allocation, maximum, [5, 7, 8, 6]))   # [0, 1, 2, 3]
```

`safe_sequence` returns `None` when the system is not in a safe state.

Employee records in a binary file:

```python
from oslabsim.files import Employee, EmployeeFile

with EmployeeFile("employee.dat") as records:
    records.append(Employee(101, "Alice", 50000))
    records.append(Employee(102, "Bob", 60000))
    for employee in records:
        print(employee)
    print(records.record(2))   # ID: 102, Name: Bob, Salary: 60000.00
```

Opening an `EmployeeFile` truncates the file it is given.

## Errors

Problems are raised as exceptions: a full directory raises
`DirectoryFullError`, a full or empty bounded buffer raises `BufferFullError`
or `BufferEmptyError`, an impossible disk allocation raises `AllocationError`,
a busy `MutexResource` or a write refused while readers are active raises
`RuntimeError`, an out-of-range record number raises `IndexError`, and invalid
arguments raise `ValueError`.

## Command line

The package installs an `oslabsim` command with two subcommands. Each reads
whitespace-separated integers from standard input.

`oslabsim fcfs` reads a process count followed by that many burst times and
prints the average waiting and turnaround times, truncated to whole numbers:

```
echo "4 8 6 4 2" | oslabsim fcfs
```

```
The average waiting time = 10
The average turnaround time = 15
```

`oslabsim bankers` reads the number of processes and resources, the allocation
matrix, the maximum matrix and the available vector, then prints the need
matrix and either a safe sequence or a message that the system is not safe:

```
echo "4 4  1 1 2 4 2 2 6 5 0 2 3 5 2 5 8 6  1 2 5 4 0 4 8 5 3 6 9 5 1 4 8 9  5 7 8 6" | oslabsim bankers
```

Malformed or missing input is reported on standard error and the command exits
with status 1.

## What the package does not do

The command line covers only the two simulations above; every other
simulation is used from Python. There are no interactive menus or prompts.
The inter-process communication functions exchange data between threads
within one Python process, not between separate operating-system processes.

## Running the tests

```
pip install .[test]
pytest
```