from subleq_evo.vm import SubleqVM


def main():
    # Quickstart goal:
    # 1) Load a tiny SUBLEQ program into a fresh 256-cell memory
    # 2) Run it until it halts or hits the step cap
    # 3) Inspect the final memory and step count

    # Each instruction is three cells A, B, C: mem[A] -= mem[B]; jump to C if the result <= 0.
    vm = SubleqVM(memory_size=256, max_execution_steps=1000)

    # [1, 1, 0] clears mem[1] and jumps back to 0. The next pass uses mem[1] = 0 as
    # an address and leaves mem[1] = 0 - mem[0] = -1; it then loops until the step cap,
    # so memory_prefix prints [1, -1, 0].
    memory, steps = vm.execute([1, 1, 0])
    print('memory_prefix:', memory[:3])
    print('steps:', steps)

    # [3, 4, 7] in an 8-cell memory branches past the last instruction slot and halts.
    small = SubleqVM(memory_size=8, max_execution_steps=1000)
    memory, steps = small.execute([3, 4, 7])
    print('halted_memory:', memory, 'steps:', steps)


if __name__ == '__main__':
    main()
