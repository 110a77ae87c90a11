from dracolor.cli.main import main

# 示例：python -m dracolor.main --query blue,500
if __name__ == "__main__":
    main()
