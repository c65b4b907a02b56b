from report_delivery.main import main

raise SystemExit(main())
