# Storage package init
